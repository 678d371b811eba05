from django.urls import path, include
from rest_framework_nested import routers
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from EtaskApp.api.views import (
    CourseViewSet,
    GradeItemViewSet,
    GradeTableView,
)

router = routers.SimpleRouter()
router.register(r"courses", CourseViewSet, basename="course")

courses_router = routers.NestedSimpleRouter(router, r"courses", lookup="course")
courses_router.register(r"grade-items", GradeItemViewSet, basename="course-grade-items")

urlpatterns = [
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="docs"),
    path("auth/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("courses/<int:course_pk>/grade-table/", GradeTableView.as_view(), name="course-grade-table"),
    path("", include(router.urls)),
    path("", include(courses_router.urls)),
]
