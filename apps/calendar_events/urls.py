from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'calendar_events'

router = DefaultRouter()
router.register(r'', views.CalendarEventViewSet, basename='calendar-event')

urlpatterns = [
    # GET    /api/calendarEvents/        - Own events (?from=&to=)
    # POST   /api/calendarEvents/        - Create event
    # PUT    /api/calendarEvents/{id}/   - Update (owner)
    # DELETE /api/calendarEvents/{id}/   - Delete (owner)
    path('', include(router.urls)),
]
