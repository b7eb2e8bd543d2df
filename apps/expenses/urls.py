from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'expenses'

router = DefaultRouter()
router.register(r'', views.ExpenseViewSet, basename='expense')

urlpatterns = [
    # GET    /api/expenses/           - Own expenses
    # POST   /api/expenses/           - Create expense
    # GET    /api/expenses/summary/   - Totals per category
    # GET    /api/expenses/{id}/      - Expense detail (owner)
    # PUT    /api/expenses/{id}/      - Update (owner)
    # DELETE /api/expenses/{id}/      - Delete (owner)
    path('', include(router.urls)),
]
