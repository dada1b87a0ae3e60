import os

# Persistence
# In a real deployment, point this at a file next to the user's data
DATABASE_URL = os.getenv('INVENTORY_DATABASE_URL', 'sqlite:///./inventory.db')
DB_ECHO = os.getenv('INVENTORY_DB_ECHO', 'false').lower() in ('1', 'true', 'yes')

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_DIR = os.getenv('LOG_DIR', 'logs')
LOG_FORMAT = os.getenv('LOG_FORMAT', 'default')

# Business rules
DEFAULT_RESTOCK_QUANTITY = int(os.getenv('DEFAULT_RESTOCK_QUANTITY', '100'))
CURRENCY_SYMBOL = os.getenv('CURRENCY_SYMBOL', '₱')
