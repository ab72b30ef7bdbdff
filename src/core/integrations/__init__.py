"""
Интеграции с внешними системами: хранилище вложений и кэш представлений.
"""
