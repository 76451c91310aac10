from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Employee authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),

    # Admin authentication
    path('admin/login/', views.admin_login, name='admin-login'),

    # Employee directory
    path('employees/', views.employee_list, name='employee-list'),
]
