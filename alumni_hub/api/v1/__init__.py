"""Version 1 HTTP routers"""
