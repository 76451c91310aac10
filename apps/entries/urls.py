from django.urls import path
from . import views

app_name = 'entries'

urlpatterns = [
    # POST /api/entries/links/{link_id}/submit/   - Submit entry (QR image or UPI id)
    path('links/<uuid:link_id>/submit/', views.submit, name='entry-submit'),

    # GET  /api/entries/links/{link_id}/          - Entries for link (?employee_id=)
    path('links/<uuid:link_id>/', views.link_entries, name='link-entries'),

    # GET  /api/entries/links/{link_id}/summary/  - Per-employee totals for link
    path('links/<uuid:link_id>/summary/', views.link_summary, name='link-summary'),

    # GET  /api/entries/links/{link_id}/mine/     - Own entries (?employee_id=&page=&limit=)
    path('links/<uuid:link_id>/mine/', views.my_link_entries, name='my-link-entries'),

    # GET  /api/entries/employees/{employee_id}/  - Entries for employee
    path('employees/<uuid:employee_id>/', views.employee_entries, name='employee-entries'),

    # GET  /api/entries/employees/{employee_id}/links/            - Links touched
    path('employees/<uuid:employee_id>/links/', views.employee_links, name='employee-links'),

    # GET  /api/entries/employees/{employee_id}/links/{link_id}/  - Entries for pair
    path(
        'employees/<uuid:employee_id>/links/<uuid:link_id>/',
        views.employee_link_entries,
        name='employee-link-entries'
    ),
]
