"""AX Architect API: workflow analysis and AX idea generation over an AI gateway."""
