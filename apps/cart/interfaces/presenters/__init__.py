# Presenters
from .cart_presenter import CartPresenter

__all__ = ['CartPresenter']
