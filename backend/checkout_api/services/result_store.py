"""Read-once handoff of the last payment result to the result page."""

import os
from typing import Optional

from shared.file_store import FileStore
from shared.models import PaymentResultRecord


class PaymentResultStore:

    def __init__(self, session_id: str, data_dir: str | None = None):
        data_dir = data_dir or os.environ.get("DATA_DIR", "/app/data")
        self.result_path = os.path.join(data_dir, "results", f"{session_id}.json")

    def save(self, record: PaymentResultRecord) -> None:
        FileStore.write_json(self.result_path, record.to_dict())

    def pop(self) -> Optional[PaymentResultRecord]:
        data = FileStore.pop_json(self.result_path)
        if data is None:
            return None
        return PaymentResultRecord(**data)
