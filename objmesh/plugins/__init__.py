"""Плагины загрузчиков; каждый модуль экспортирует `register(manager)`."""
