"""Source model: variants, classification and naming."""
