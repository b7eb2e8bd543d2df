from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'group_trips'

# Router for ViewSets
router = DefaultRouter()
router.register(r'', views.GroupTripViewSet, basename='group-trip')

urlpatterns = [
    # Group trip ViewSet routes
    # GET    /api/groupTrips/              - List user's trips
    # POST   /api/groupTrips/              - Create trip
    # GET    /api/groupTrips/{id}/         - Get trip details (member)
    # PUT    /api/groupTrips/{id}/         - Update trip (creator)
    # PATCH  /api/groupTrips/{id}/         - Partial update (creator)
    # DELETE /api/groupTrips/{id}/         - Delete trip (creator)

    # Custom trip actions
    # PUT    /api/groupTrips/{id}/members/              - Add members
    # DELETE /api/groupTrips/{id}/members/{member_id}/  - Remove member / leave
    # POST   /api/groupTrips/{id}/itinerary/            - Add itinerary item
    # POST   /api/groupTrips/{id}/expenses/             - Add group expense
    # POST   /api/groupTrips/{id}/documents/            - Upload document
    # GET    /api/groupTrips/{id}/expense_summary/      - Split and balances

    # Include router URLs
    path('', include(router.urls)),
]
