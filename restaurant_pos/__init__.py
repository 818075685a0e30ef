"""Restaurant point-of-sale simulator."""
