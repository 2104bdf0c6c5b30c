from django.urls import path

from tickets.handlers import PurchaseView, QuoteView

urlpatterns = [
    path("purchases", PurchaseView.as_view(), name="purchase"),
    path("purchases/quote", QuoteView.as_view(), name="purchase-quote"),
]
