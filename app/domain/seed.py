"""
Initial snapshot loaded at startup.

State is session-scoped: every restart begins again from this data.
"""
from app.domain.models import AppData, Farmer, PlantingArea, PurchaseRecord


def build_seed_data() -> AppData:
    """Return the demo aggregate for the Hoa Cuong purchasing network."""
    return AppData(
        areas=(
            PlantingArea(id="1", code="VN-DL-001", name="Vùng Đạ Huoai A",
                         location="Đạ Huoai, Lâm Đồng", area_size=15.5, crop_type="Sầu riêng"),
            PlantingArea(id="2", code="VN-DL-002", name="Vùng Bảo Lộc B",
                         location="Bảo Lộc, Lâm Đồng", area_size=8.2, crop_type="Cà phê"),
            PlantingArea(id="3", code="VN-DL-003", name="Vùng Di Linh C",
                         location="Di Linh, Lâm Đồng", area_size=12.0, crop_type="Sầu riêng"),
        ),
        farmers=(
            Farmer(id="f1", name="Nguyễn Văn A", phone="0912345678", area_id="1"),
            Farmer(id="f2", name="Trần Thị B", phone="0987654321", area_id="1"),
            Farmer(id="f3", name="Lê Văn C", phone="0909090909", area_id="2"),
        ),
        purchases=(
            PurchaseRecord.create(id="p1", farmer_id="f1", date="2023-10-15",
                                  weight=500, price_per_kg=80000, quality="A"),
            PurchaseRecord.create(id="p2", farmer_id="f2", date="2023-10-16",
                                  weight=300, price_per_kg=75000, quality="B"),
            PurchaseRecord.create(id="p3", farmer_id="f1", date="2023-10-20",
                                  weight=600, price_per_kg=82000, quality="A"),
            PurchaseRecord.create(id="p4", farmer_id="f3", date="2023-11-05",
                                  weight=1000, price_per_kg=45000, quality="A",
                                  note="Cà phê tươi"),
        ),
    )
