from django.urls import path
from . import views

app_name = 'links'

urlpatterns = [
    # GET  /api/links/            - List links with latest flag
    # POST /api/links/            - Create link
    path('', views.link_list, name='link-list'),

    # GET  /api/links/{id}/       - Get link
    path('<uuid:link_id>/', views.link_detail, name='link-detail'),
]
