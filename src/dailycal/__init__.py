"""Daily calorie recommendations from the Mifflin-St Jeor equation."""

__version__ = "0.1.0"
