"""cowsay-wrapper 核心功能。"""
