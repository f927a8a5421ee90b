# app/config.py
import os

from dotenv import load_dotenv

load_dotenv()

APP_NAME    = os.getenv("APP_NAME", "Catalog Lookup API")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
HOST        = os.getenv("HOST", "0.0.0.0")
PORT        = int(os.getenv("PORT", "8080"))
LOG_LEVEL   = os.getenv("LOG_LEVEL", "INFO").upper()

MONGO_URI      = os.getenv("MONGO_URI", "mongodb://localhost:27017")
DB_NAME        = os.getenv("MONGO_DB", "global_mobility-apex-ecommerce")
PRODUCTS_COLL  = os.getenv("MONGO_PRODUCTS_COLL", "products")
CUSTOMERS_COLL = os.getenv("MONGO_CUSTOMERS_COLL", "customers")

# seconds
CONNECT_TIMEOUT_S = float(os.getenv("MONGO_CONNECT_TIMEOUT_S", "10"))
LOOKUP_TIMEOUT_S  = float(os.getenv("MONGO_LOOKUP_TIMEOUT_S", "5"))
