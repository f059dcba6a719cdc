"""Nutritional profile domain: energy expenditure and macro split."""
