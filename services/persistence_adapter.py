# -*- coding: utf-8 -*-
"""
Persistence Adapter - writes finished wizards to the hosted store.

Two paths:
- save(): one insert of the row a WizardDefinition builds from a draft
- upload_existing(): blob upload followed by an insert referencing it

Neither path retries. The upload path is not transactional: if the
insert fails after the blob was stored, OrphanedBlobError is raised and
the blob is left where it is.
"""

import json
import os
from typing import Any, Dict, Optional

from services.data_store import DataStore
from services.exceptions import OrphanedBlobError, StoreError, ValidationError
from ui.wizards.framework.field_binder import Draft
from ui.wizards.framework.wizard_definition import LegalDocumentWizard, WizardDefinition
from utils.logger import get_logger

logger = get_logger(__name__)


class PersistenceAdapter:
    """
    Maps drafts and uploaded files onto store calls.

    The user id is passed to every call; the adapter holds no session.
    """

    def __init__(self, store: DataStore):
        self.store = store

    def save(self, definition: WizardDefinition, draft: Draft, user_id: str) -> str:
        """
        Insert the record for a finished draft.

        Returns:
            Id of the inserted row

        Raises:
            ValidationError: no user id
            StoreError: the store rejected the insert or was unreachable
        """
        _require_user(user_id)

        row = definition.to_record(draft, user_id)
        logger.info(
            f"Saving {definition.kind.value} to {definition.table} for user {user_id}"
        )
        stored = self.store.insert(definition.table, row)
        record_id = _record_id(stored)
        logger.info(f"Saved {definition.kind.value} as {definition.table}/{record_id}")
        return record_id

    def upload_existing(
        self,
        definition: LegalDocumentWizard,
        file_path: Optional[str],
        user_id: str,
        variant: Optional[str] = None
    ) -> str:
        """
        Store an existing document file and record it.

        Args:
            definition: Legal wizard the document belongs to
            file_path: Local file to upload
            user_id: Owner of the document
            variant: Document variant, e.g. "trust" for the wills page

        Returns:
            Id of the inserted row

        Raises:
            ValidationError: no file chosen or unknown variant
            StoreError: the upload failed (nothing was written)
            OrphanedBlobError: the upload succeeded but the insert failed
        """
        _require_user(user_id)
        if not file_path:
            raise ValidationError("Please choose a file to upload", field="file")
        try:
            doc_type = definition.upload_type(variant)
        except ValueError as e:
            raise ValidationError(str(e), field="variant")

        file_name = os.path.basename(file_path)
        blob_path = definition.upload_path(user_id, file_name, variant)

        logger.info(f"Uploading {file_name} to {definition.bucket}/{blob_path}")
        stored_path = self.store.upload(definition.bucket, blob_path, file_path)

        row = {
            "user_id": user_id,
            "title": definition.upload_title(file_name, variant),
            "type": doc_type,
            "status": "active",
            "content": json.dumps({"file_path": stored_path}),
        }
        try:
            stored = self.store.insert(definition.table, row)
        except StoreError as e:
            logger.warning(
                f"Insert failed after upload; blob {definition.bucket}/{stored_path} "
                f"is not referenced by any document"
            )
            raise OrphanedBlobError(
                e.message,
                blob_path=stored_path,
                original_error=e,
                context="upload",
            ) from e

        record_id = _record_id(stored)
        logger.info(f"Recorded uploaded document {definition.table}/{record_id}")
        return record_id


def _require_user(user_id: str):
    if not user_id:
        raise ValidationError("You must be signed in to save documents", field="user_id")


def _record_id(row: Dict[str, Any]) -> str:
    record_id = (row or {}).get("id")
    if record_id is None:
        raise StoreError("Store did not return the inserted record", response_data=row)
    return str(record_id)
