from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    ExpenseSerializer,
    ExpenseCreateSerializer,
    ExpenseUpdateSerializer,
    ExpenseSummarySerializer,
)

from apps.group_trips.services import GroupTripNotFoundError, NotTripMemberError
from apps.travel_logs.services import TravelLogNotFoundError
from apps.expenses.services import (
    create_expense,
    list_user_expenses,
    get_expense,
    update_expense,
    delete_expense,
    get_expense_summary,
    # Exceptions
    ExpenseNotFoundError,
    NotExpenseOwnerError,
    LinkedLogNotOwnedError,
)

NOT_FOUND_ERRORS = (ExpenseNotFoundError, TravelLogNotFoundError, GroupTripNotFoundError)
NOT_AUTHORIZED_ERRORS = (NotExpenseOwnerError, LinkedLogNotOwnedError, NotTripMemberError)


class ExpenseViewSet(viewsets.GenericViewSet):
    """
    ViewSet for personal expenses.

    list: The caller's expenses, newest first
    create: Record an expense
    retrieve/update/partial_update/destroy: Owner only
    summary: Totals per category
    """

    serializer_class = ExpenseSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = '[0-9a-fA-F-]+'

    def get_queryset(self):
        return list_user_expenses(user=self.request.user)

    @extend_schema(responses={200: ExpenseSerializer(many=True)})
    def list(self, request):
        """List the caller's expenses."""
        return Response(ExpenseSerializer(self.get_queryset(), many=True).data)

    @extend_schema(request=ExpenseCreateSerializer, responses={201: ExpenseSerializer})
    def create(self, request):
        """Record an expense, optionally linked to a travel log or group trip."""
        serializer = ExpenseCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            expense = create_expense(user=request.user, **serializer.validated_data)
        except NOT_FOUND_ERRORS as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NOT_AUTHORIZED_ERRORS as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

        return Response(ExpenseSerializer(expense).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        try:
            expense = get_expense(expense_id=pk, user=request.user)
        except ExpenseNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotExpenseOwnerError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

        return Response(ExpenseSerializer(expense).data)

    @extend_schema(request=ExpenseUpdateSerializer, responses={200: ExpenseSerializer})
    def update(self, request, pk=None):
        """Update an expense (owner only). Only provided fields change."""
        serializer = ExpenseUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            expense = update_expense(expense_id=pk, user=request.user, **serializer.validated_data)
        except NOT_FOUND_ERRORS as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NOT_AUTHORIZED_ERRORS as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

        return Response(ExpenseSerializer(expense).data)

    @extend_schema(request=ExpenseUpdateSerializer, responses={200: ExpenseSerializer})
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        try:
            delete_expense(expense_id=pk, user=request.user)
        except ExpenseNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotExpenseOwnerError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

        return Response({'msg': 'Expense removed'})

    @extend_schema(responses={200: ExpenseSummarySerializer})
    @action(detail=False, methods=['get'])
    def summary(self, request):
        """Total spent and per-category totals for the caller."""
        summary = get_expense_summary(user=request.user)
        return Response(ExpenseSummarySerializer(summary).data)
