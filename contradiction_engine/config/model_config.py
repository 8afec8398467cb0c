"""
Model configuration for the Contradiction Debt Playground.
Contains the violation cap, tipping-rule thresholds and playground defaults.
"""

# Model Configuration
# NOTE: Threshold values match the published playground exactly; change them
# per engine instance rather than editing this dictionary in place.
MODEL_CONFIG = {
    # Violation aggregation
    "violation": {
        "cap": 2.0,  # V_total = min(cap, sum of domain scores)
    },

    # Tipping rules (each rule counts equally)
    "tipping_thresholds": {
        "legitimacy_below": 0.45,  # L < 0.45
        "elite_cohesion_below": 0.60,  # E < 0.60
        "backfire_above": 0.50,  # B > 0.50
        "cost_strain_above": 0.35,  # C > 0.35
        "repair_ratio_below": 0.5,  # R/V < 0.5 (only when V > 0)
    },

    # Rupture window: flagged once this many rules breach together
    "rupture_window": {
        "min_flags": 2,
    },
}

# Playground Parameters
PLAYGROUND_CONFIG = {
    "horizon": {
        "default": 8,
        "min": 1,
        "max": 40,
    },
    "export_filename": "cd_playground_scenarios.json",
    "export_indent": 2,

    # Values a "New Case" starts with
    "new_case": {
        "name": "New Case",
        "id_prefix": "case_",
        "baseline_debt": 1.5,
        "triple": {"scope": 0.5, "severity": 0.5, "salience": 0.5},
        "repair": {"ack": 0.4, "reform": 0.4, "comp": 0.4, "inclusive": 0.4, "fidelity": 0.4},
        "health": {"L": 0.6, "E": 0.6, "K": 0.6, "C": 0.2, "B": 0.3, "T": 0.6, "P": 0.3},
    },

    # Used when an imported period carries no baselineD at all
    "missing_baseline_debt": 0.0,
    "alt_model_label": "Alt model",
}
