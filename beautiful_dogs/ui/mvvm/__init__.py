"""
MVVM Package - property change notification for PySide6 view models.
"""
from beautiful_dogs.ui.mvvm.bindable import BindableProperty, BindableBase
from beautiful_dogs.ui.mvvm.viewmodel import CartBoundViewModel

__all__ = [
    "BindableBase",
    "BindableProperty",
    "CartBoundViewModel",
]
