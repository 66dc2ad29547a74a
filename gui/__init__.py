"""Tk front-end for LiftLog.

`gui.app` holds the controller and imports no Tk code, so it (and
`gui.state`, `gui.services`) can be used headless. Widgets live in
`gui.views`, `gui.components` and `gui.main_window`.
"""
