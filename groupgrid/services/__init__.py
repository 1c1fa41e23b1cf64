"""Services package - long-lived objects owned by the Application."""
