from django.urls import path
from . import views

app_name = 'navwidget'

urlpatterns = [
    # Demo page (menus come from the navigation context processor)
    path('', views.demo, name='demo'),

    # Static collaborators
    path('dropdown.css', views.dropdown_css, name='dropdown_css'),
    path('dropdown.js', views.dropdown_js, name='dropdown_js'),

    # Fragments
    path('menus/<str:name>/', views.menu_fragment, name='menu_fragment'),
    path('render/', views.render_dropdown, name='render_dropdown'),
]
