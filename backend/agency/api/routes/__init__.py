"""HTTP routers, registered explicitly in main.py."""
