# PATH: apps/domains/jobs/views.py
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.permissions import is_system_admin
from apps.domains.jobs.models import SyncJob
from apps.domains.jobs.services import build_job_status_response


class SyncJobStatusView(APIView):
    """GET: 비동기 작업 상태 (폴링용)"""
    permission_classes = [IsAuthenticated]

    def get(self, request, job_id):
        qs = SyncJob.objects.all()
        if not is_system_admin(request.user):
            qs = qs.filter(union_id=request.user.union_id)
        job = qs.filter(id=job_id).first()
        if job is None:
            return Response({"error": "작업을 찾을 수 없습니다."}, status=status.HTTP_404_NOT_FOUND)
        return Response(build_job_status_response(job))
