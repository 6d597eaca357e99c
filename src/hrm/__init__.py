"""HRM - HTTP surface of the HR management identity backend."""
