from .to_persian import classify, resolve_reference_tz, to_persian

__all__ = ['classify', 'resolve_reference_tz', 'to_persian']
