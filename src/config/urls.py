from django.urls import include, path

urlpatterns = [
    path("", include("modules.core.urls")),
    # Product catalog pages
    path("produtos/", include("modules.products.urls")),
]
