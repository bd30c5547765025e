"""Jinja2 模板，随包安装"""
