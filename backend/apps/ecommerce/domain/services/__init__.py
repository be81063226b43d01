from . import fee_engine, order_workflow

__all__ = ['fee_engine', 'order_workflow']
