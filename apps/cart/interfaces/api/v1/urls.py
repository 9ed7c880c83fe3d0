"""
Cart API v1 URLs.
"""
from django.urls import path

from .views import (
    CartView,
    CartAddView,
    CartUpdateView,
    CartDeleteView,
)

urlpatterns = [
    path('', CartView.as_view(), name='cart'),
    path('add/', CartAddView.as_view(), name='cart-add'),
    path('update/', CartUpdateView.as_view(), name='cart-update'),
    path('delete/', CartDeleteView.as_view(), name='cart-delete'),
]
