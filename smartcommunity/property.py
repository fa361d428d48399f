"""Owners' property registration documents and their upload status."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from smartcommunity.database import Database

UPLOADED = "已上传电子版"
NOT_UPLOADED = "未上传电子版"

DOCUMENT_COLUMNS = (
    "application_for_real_estate_registration",
    "identity_proof_materials",
    "documents_on_the_origin_and_proof_of_real_estate_ownership",
    "materials_on_real_estate_boundaries",
    "spatial_limits",
    "area",
    "explanatory_materials_on_stakeholder_relationships_with_others",
    "commercial_housing_sales_contract",
    "tax_payment_certificate",
    "maintenance_fund_receipt",
)

HEADERS = (
    "ID",
    "姓名",
    "房地产登记申请书",
    "身份证明材料",
    "不动产权属来源及证明文件",
    "不动产界址",
    "空间界限",
    "面积",
    "与他人利害关系的说明材",
    "商品房买卖合同",
    "完税证明",
    "维修基金收据",
)


def status_label(value: object) -> str:
    """Return the display label for a stored upload flag."""
    return UPLOADED if str(value) == "1" else NOT_UPLOADED


def parse_status(label: str) -> int:
    """Return 1 for the uploaded label and 0 for anything else."""
    return 1 if label == UPLOADED else 0


@dataclass(frozen=True)
class PropertyRecord:
    """One property of an owner with the upload state of each document."""

    id: int
    name: str | None
    documents: dict[str, bool] = field(default_factory=dict)

    @property
    def labels(self) -> list[str]:
        """Display labels of the documents, in column order."""
        return [status_label(int(self.documents[c])) for c in DOCUMENT_COLUMNS]


def list_properties(db: Database, owner_id: int) -> list[PropertyRecord]:
    """Return every property registered for the owner."""
    columns = ", ".join(DOCUMENT_COLUMNS)
    rows = db.query(
        f"SELECT id, name, {columns} FROM owner_property WHERE owner_id = ?",
        (owner_id,),
    )
    return [
        PropertyRecord(
            id=row["id"],
            name=row["name"],
            documents={c: str(row[c]) == "1" for c in DOCUMENT_COLUMNS},
        )
        for row in rows
    ]


def _flag(value: str | bool | int) -> int:
    if isinstance(value, str):
        return parse_status(value)
    return int(bool(value))


def update_documents(
    db: Database,
    property_id: int,
    owner_id: int,
    statuses: Sequence[str | bool | int],
) -> bool:
    """Set the ten document flags of one property; return whether it matched."""
    if len(statuses) != len(DOCUMENT_COLUMNS):
        raise ValueError(
            f"expected {len(DOCUMENT_COLUMNS)} statuses, got {len(statuses)}"
        )
    assignments = ", ".join(f"{c} = ?" for c in DOCUMENT_COLUMNS)
    db.query(
        f"UPDATE owner_property SET {assignments} WHERE id = ? AND owner_id = ?",
        (*(_flag(s) for s in statuses), property_id, owner_id),
    )
    return db.query("SELECT changes()")[0][0] > 0