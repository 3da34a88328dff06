"from app"
