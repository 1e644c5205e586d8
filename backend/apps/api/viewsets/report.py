# apps/api/viewsets/report.py
"""
Rapports, export des temps et tableau de bord
"""

import csv
import logging

from django.http import StreamingHttpResponse
from django.utils import timezone
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.cabinet import reports
from apps.cabinet.serializers import DateRangeSerializer, TimesheetQuerySerializer
from apps.core.access import access_for
from apps.core.decorators import gate_required

logger = logging.getLogger(__name__)


class Echo:
    """Pseudo-buffer : csv.writer écrit ligne par ligne dans la réponse"""

    def write(self, value):
        return value


class ReportViewSet(viewsets.ViewSet):
    """
    Rapports (période ?from=YYYY-MM-DD&to=YYYY-MM-DD, bornes incluses)

    - GET /api/reports/productivity/ - Minutes par client et par collaborateur
    - GET /api/reports/timesheet/?user_id= - Feuille de temps
    - GET /api/reports/client-costs/ - Coût valorisé par client
    """

    permission_classes = [IsAuthenticated]

    def _period(self, request, serializer_class=DateRangeSerializer):
        serializer = serializer_class.from_query_params(request.query_params)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data

    @action(detail=False, methods=['get'])
    @gate_required('view_reports')
    def productivity(self, request):
        period = self._period(request)
        return Response(reports.productivity(period['date_from'], period['date_to']))

    @action(detail=False, methods=['get'])
    @gate_required('view_reports')
    def timesheet(self, request):
        period = self._period(request, TimesheetQuerySerializer)
        entries = reports.timesheet(period['date_from'], period['date_to'], period.get('user_id'))
        return Response({'entries': entries})

    @action(detail=False, methods=['get'], url_path='client-costs')
    @gate_required('view_reports')
    @gate_required('view_client_costs')
    def client_costs(self, request):
        period = self._period(request)
        return Response({
            'per_client': reports.client_costs(period['date_from'], period['date_to'])
        })


class ExportViewSet(viewsets.ViewSet):
    """
    - GET /api/exports/time-csv/ - Export CSV des temps (compatible Excel)
    """

    permission_classes = [IsAuthenticated]

    @action(detail=False, methods=['get'], url_path='time-csv')
    @gate_required('export_time')
    def time_csv(self, request):
        writer = csv.writer(Echo())
        filename = f"time_entries_{timezone.localtime():%Y%m%d_%H%M%S}.csv"
        response = StreamingHttpResponse(
            (writer.writerow(row) for row in reports.time_csv_rows()),
            content_type='text/csv'
        )
        response['Content-Disposition'] = f'attachment; filename="{filename}"'
        logger.info("Export CSV des temps par l'utilisateur %s", request.user.pk)
        return response


class OverviewViewSet(viewsets.ViewSet):
    """
    - GET /api/overview/ - Compteurs, éléments récents, tâches par statut et en retard
    """

    permission_classes = [IsAuthenticated]

    def list(self, request):
        return Response(reports.overview(access_for(request)))
