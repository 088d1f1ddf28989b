"""
Плагины: модули с функцией `register(registry)`.
"""
