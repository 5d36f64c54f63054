"""Storefront URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.storefront.views import product_detail

urlpatterns = [
    path("product/<str:slug>", product_detail, name="product-detail"),
]
