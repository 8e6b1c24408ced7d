"""Qt-facing services for the picker GUI.

Import :mod:`assetpicker.gui.services.qt_click_adapter` directly; it
requires PySide6.
"""
