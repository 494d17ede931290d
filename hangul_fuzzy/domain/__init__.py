"""Pure Hangul classification and similarity logic."""
