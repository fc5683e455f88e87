"""URL configuration for the entries API."""

from django.urls import path
from rest_framework.routers import SimpleRouter

from .api import AdminEntryViewSet, AttachmentView, MyEntryView, StageOptionView, StageView

app_name = "entries"

router = SimpleRouter()
router.register(r"admin", AdminEntryViewSet, basename="admin-entry")

urlpatterns = [
    path("me/", MyEntryView.as_view(), name="my-entry"),
    path("stages/<str:stage>/", StageView.as_view(), name="stage"),
    path("stages/<str:stage>/options/", StageOptionView.as_view(), name="stage-options"),
    path("files/<str:role>/", AttachmentView.as_view(), name="attachment"),
] + router.urls
