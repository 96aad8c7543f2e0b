from .retention_buffer import RetentionBuffer, RetentionEntry

__all__ = ['RetentionBuffer', 'RetentionEntry']
