"""
Global hotkey subsystem.

- resolver.py: "Ctrl+Alt+K" -> KeyCombination
- binding.py: the single live OS binding and its swap policy
"""
