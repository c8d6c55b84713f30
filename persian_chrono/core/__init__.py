"""Pure calendar arithmetic: Gregorian ordinals, leap rules, conversions."""
