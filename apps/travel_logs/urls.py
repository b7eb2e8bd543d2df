from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'travel_logs'

router = DefaultRouter()
router.register(r'', views.TravelLogViewSet, basename='travel-log')

urlpatterns = [
    # GET    /api/travelLogs/                  - Own logs (?status=)
    # POST   /api/travelLogs/                  - Create log
    # GET    /api/travelLogs/public/           - Community feed (no auth)
    # GET    /api/travelLogs/stats/            - Dashboard stats
    # POST   /api/travelLogs/add-member/       - Share a log by email
    # GET    /api/travelLogs/{id}/             - Log detail
    # PUT    /api/travelLogs/{id}/             - Update (owner)
    # DELETE /api/travelLogs/{id}/             - Delete (owner)
    # PUT    /api/travelLogs/{id}/like/        - Like
    # PUT    /api/travelLogs/{id}/unlike/      - Unlike
    # PUT    /api/travelLogs/{id}/bookmark/    - Bookmark
    # PUT    /api/travelLogs/{id}/unbookmark/  - Remove bookmark
    path('', include(router.urls)),
]
