from .formatting import format_quantity, format_residual

__all__ = [
    'format_quantity',
    'format_residual'
]
