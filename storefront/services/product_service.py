# storefront/services/product_service.py
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.domain.errors import NotFound, ProductInUse
from storefront.domain.schemas import ProductCreate, ProductRead, ProductUpdate
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def _get_or_404(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFound("Product not found")
        return product

    def create_product(self, payload: ProductCreate) -> ProductRead:
        created = self.repo.create_product(ProductModel(**payload.model_dump()))
        logger.info(f"Created product {created.id}")
        return ProductRead.model_validate(created)

    def get_product(self, product_id: int) -> ProductRead:
        return ProductRead.model_validate(self._get_or_404(product_id))

    def list_products(self) -> List[ProductRead]:
        return [ProductRead.model_validate(p) for p in self.repo.list_products()]

    def update_product(self, product_id: int, payload: ProductUpdate) -> ProductRead:
        product = self._get_or_404(product_id)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        if changes:
            product = self.repo.update_product(product, changes)
            logger.info(f"Updated product {product_id}: {sorted(changes)}")
        return ProductRead.model_validate(product)

    def delete_product(self, product_id: int) -> None:
        product = self._get_or_404(product_id)
        try:
            self.repo.delete_product(product)
        except IntegrityError:
            # FK z cart_items
            self.repo.rollback()
            raise ProductInUse()
        logger.info(f"Deleted product {product_id}")
