# core/config.py
import os

MONGO_URL = os.environ.get("MONGO_URL", "mongodb://localhost:27017")
MONGO_DB = os.environ.get("MONGO_DB", "shop")

SECRET_KEY = os.environ.get("SECRET_KEY", "change-me")
ALGORITHM = os.environ.get("ALGORITHM", "HS256")

# Thuế bán hàng áp dụng cho sản phẩm taxable (0.05 = 5%)
TAX_RATE = float(os.environ.get("TAX_RATE", "0.05"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
CORS_ORIGIN_REGEX = os.environ.get("CORS_ORIGIN_REGEX", ".*")
