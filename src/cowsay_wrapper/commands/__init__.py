"""cowsay-wrapper 命令实现。"""
