"""Тексты демо-приложения в JSON: texts.json (нейтральные) и texts.<культура>.json"""
