from django.urls import path
from .views import main_views as views
from .views import invoice_views

app_name = "invoices"

urlpatterns = [
    path('', views.landing_view, name='home'),
    path('login/', views.login_view, name='login'),
    path('signup/', views.signup_view, name='signup'),
    path('logout/', views.logout_view, name='logout'),
    path('dashboard/', views.dashboard, name='dashboard'),

    # Invoices
    path('dashboard/invoices/', invoice_views.invoice_list, name='invoice_list'),
    path('dashboard/invoices/create/', invoice_views.invoice_create, name='invoice_create'),
    path('dashboard/invoices/<str:invoice_id>/edit/', invoice_views.invoice_edit, name='invoice_edit'),
    path('dashboard/invoices/<str:invoice_id>/delete/', invoice_views.invoice_delete, name='invoice_delete'),
]
