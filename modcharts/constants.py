"""Constants and default values for the model charts."""
from typing import Dict, Tuple

# Preset model colors (HEX). X and X-retrain share a color on purpose.
MODEL_HEX_COLORS: Dict[str, str] = {
    "m6Anet": "#2e3792",
    "m6Anet-retrain": "#2e3792",
    "EpiNano": "#8e5aa2",
    "EpiNano-retrain": "#8e5aa2",
    "SingleMod": "#f6c365",
    "SingleMod-retrain": "#f6c365",
    "NanoSPA": "#bc1932",
    "NanoSPA-retrain": "#bc1932",
    "TandemMod": "#9DCB62",
    "TandemMod-retrain": "#9DCB62",
    "Dinopore": "#F4B5CA",
    "Dinopore-retrain": "#F4B5CA",
    "Nanom6A": "#098889",
    "ELIGOS": "#cca814",
    "ELIGOS_diff": "#c5781a",
    "MINES": "#7b5223",
    "EpiNano_delta": "#c896c8",
    "CHEUI": "#6ab93c",
    "Tombo": "#57217b",
    "Tombo_com": "#b82373",
    "DiffErr": "#cfe298",
    "DRUMMER": "#d25a9c",
    "xPore": "#5d96d0",
    "Nanocompore": "#969696",
    "DENA": "#a8d6b3",
    "m6Aiso": "#f1881a",
    "pum6A": "#129abf",
    "NanoMUD": "#78862f",
    "NanoRMS": "#4b4b4b",
    "PsiNanopore": "#2a65b0",
    "Xron": "#6affb9",
    "Dorado": "#ef1fff",
}

# Fallback color for models without a preset: hsl(<spaced hue>, 70%, 60%)
FALLBACK_SATURATION = 70
FALLBACK_LIGHTNESS = 60

# Modification types and stoichiometry suffixes of the result files
MODIFICATION_TYPES: Tuple[str, ...] = ("m6A", "ψ", "m5C", "AtoI", "m7G", "m1A")
RESULT_SUFFIXES: Tuple[str, ...] = ("_002", "_004")

# Display order for result CSV files: every _002 file, then every _004 file
PREFERRED_CSV_ORDER: Tuple[str, ...] = tuple(
    f"{mod}{suffix}.csv" for suffix in RESULT_SUFFIXES for mod in MODIFICATION_TYPES
)

# Results tables
MODEL_COLUMN = "model"
DEFAULT_METRIC = "AUC"
