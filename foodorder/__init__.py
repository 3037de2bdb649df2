"""Food detail screen and order-composition engine."""
