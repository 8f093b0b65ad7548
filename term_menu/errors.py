"""Exceptions raised by terminal menus."""


class MenuError(Exception):
    """Base exception for all menu-related exceptions"""
    pass


class MenuConfigError(MenuError, ValueError):
    """The options or defaults handed to a menu cannot be used"""
    pass


class TerminalNotInteractiveError(MenuError):
    """The terminal cannot take part in an interactive menu"""
    pass
