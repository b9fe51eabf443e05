"""Pure math: calendar arithmetic and load progression."""
