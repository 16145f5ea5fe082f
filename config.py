"""
Configuration file for the daily menu CLI
"""

# Source page
FOOD_URL = "https://www.kasca-mrlacnik.jedilnilist.si/stran/malica/"

# HTTP settings
REQUEST_TIMEOUT = 10  # seconds, single attempt
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

# Locale of the source page
CURRENCY_SYMBOL = "€"

# Presentation
PRICE_SPACE_PADDING = 2  # spaces between the longest name and its price
