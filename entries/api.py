"""REST API views for participants' entries and administrator review."""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.http import Http404
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView

from . import attachments, services, sync
from .models import ROLE_STAGES, STAGE_MODELS, AttachmentRole, Entry, Stage
from .serializers import (
    BulkStatusSerializer,
    EntrySerializer,
    SelectionSerializer,
    SyncOptionSerializer,
    stage_payload,
)

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes"}


def _stage_or_404(value: str) -> Stage:
    try:
        return Stage(value)
    except ValueError:
        raise Http404(f"Unknown stage {value!r}.") from None


def _locked_response(exc: services.StageLocked) -> Response:
    return Response({"detail": str(exc), "deadline": exc.deadline}, status=status.HTTP_423_LOCKED)


def _entry_for(user) -> Entry | None:
    return Entry.objects.filter(user=user).first()


class MyEntryView(APIView):
    def get(self, request):
        entry = _entry_for(request.user)
        if entry is None:
            return Response({"detail": "No entry yet."}, status=status.HTTP_404_NOT_FOUND)
        return Response(EntrySerializer(entry).data)


class StageView(APIView):
    def get(self, request, stage):
        stage = _stage_or_404(stage)
        return Response(stage_payload(stage, _entry_for(request.user)))

    def put(self, request, stage):
        stage = _stage_or_404(stage)
        controller = services.StageFormController(
            stage,
            user=request.user,
            validate_before_save=request.query_params.get("validate", "").lower() in TRUE_VALUES,
        )
        is_temporary = request.query_params.get("temporary", "").lower() in TRUE_VALUES
        try:
            saved = controller.save(request.data, is_temporary=is_temporary)
        except services.StageLocked as exc:
            return _locked_response(exc)
        if not saved:
            return Response(
                {"detail": controller.message, "errors": controller.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        payload = stage_payload(stage, controller.entry)
        payload["message"] = controller.message
        return Response(payload)


class StageOptionView(APIView):
    def post(self, request, stage):
        stage = _stage_or_404(stage)
        serializer = SyncOptionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        entry = _entry_for(request.user)
        if entry is None:
            return Response({"detail": "Save your basic information first."}, status=status.HTTP_400_BAD_REQUEST)
        try:
            services.ensure_stage_open(stage)
        except services.StageLocked as exc:
            return _locked_response(exc)

        record = entry.stage_record(stage) or STAGE_MODELS[stage](entry=entry)
        try:
            sync.apply_option(record, serializer.validated_data["group"], serializer.validated_data["option"])
        except ValueError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(stage_payload(stage, entry))


class AttachmentView(APIView):
    def _role_or_404(self, value: str) -> AttachmentRole:
        try:
            return AttachmentRole(value)
        except ValueError:
            raise Http404(f"Unknown attachment role {value!r}.") from None

    def post(self, request, role):
        role = self._role_or_404(role)
        upload = request.FILES.get("file")
        if upload is None:
            return Response({"detail": "Attach a file under 'file'."}, status=status.HTTP_400_BAD_REQUEST)
        entry = _entry_for(request.user)
        if entry is None:
            return Response({"detail": "Save your basic information first."}, status=status.HTTP_400_BAD_REQUEST)
        try:
            path = services.store_attachment(entry, upload, role)
        except services.StageLocked as exc:
            return _locked_response(exc)
        except ValidationError as exc:
            return Response({"detail": exc.messages}, status=status.HTTP_400_BAD_REQUEST)
        except IntegrityError:
            return Response(
                {"detail": "Another upload for this file is in progress. Try again."},
                status=status.HTTP_409_CONFLICT,
            )
        attachment = attachments.current(entry, role)
        return Response(
            {
                "role": role,
                "stage": ROLE_STAGES[role],
                "file_path": path,
                "url": attachments.signed_url(attachment),
                "entry": EntrySerializer(entry).data,
            },
            status=status.HTTP_201_CREATED,
        )

    def delete(self, request, role):
        role = self._role_or_404(role)
        entry = _entry_for(request.user)
        if entry is None:
            return Response(status=status.HTTP_404_NOT_FOUND)
        try:
            services.remove_attachment(entry, role)
        except services.StageLocked as exc:
            return _locked_response(exc)
        except ValidationError as exc:
            return Response({"detail": exc.messages}, status=status.HTTP_400_BAD_REQUEST)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminEntryViewSet(viewsets.GenericViewSet):
    queryset = Entry.objects.all()
    serializer_class = EntrySerializer
    permission_classes = [permissions.IsAdminUser]

    @action(detail=True, methods=["put"])
    def selection(self, request, pk=None):
        entry = self.get_object()
        serializer = SelectionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        selection = services.record_selection(
            entry,
            request.user,
            status=serializer.validated_data["status"],
            score=serializer.validated_data.get("score"),
            comments=serializer.validated_data.get("comments", ""),
        )
        return Response(SelectionSerializer(selection).data)

    @action(detail=False, methods=["put"], url_path="status")
    def bulk_status(self, request):
        serializer = BulkStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        updated = services.bulk_update_status(
            serializer.validated_data["entry_ids"], serializer.validated_data["status"]
        )
        logger.info("User %s set %s entries to %s", request.user.pk, updated, serializer.validated_data["status"])
        return Response({"updated": updated})
