from assetpicker.events.signal import ObservableProperty, Signal

from .base import BaseViewModel
from .picker_viewmodel import PickerViewModel

__all__ = [
    "BaseViewModel",
    "ObservableProperty",
    "PickerViewModel",
    "Signal",
]
