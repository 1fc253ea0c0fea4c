from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, Integer, String, Text, DateTime, Numeric

from storefront.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("stock_quantity >= 0", name="ck_products_stock_non_negative"),
    )

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    price = Column(Numeric(10, 2), nullable=False)
    stock_quantity = Column(Integer, nullable=False, default=0)

    # kategorie i marki zarzadzane poza tym serwisem
    category_id = Column(Integer)
    brand_id = Column(Integer)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
