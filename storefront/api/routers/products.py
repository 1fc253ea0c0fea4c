# storefront/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import require_auth
from storefront.data.database import get_db
from storefront.domain.schemas import Message, ProductCreate, ProductRead, ProductUpdate
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def get_service(db: Session):
    return ProductService(db)


# odczyt katalogu bez tokena
@router.get("", response_model=List[ProductRead])
def list_products(db: Session = Depends(get_db)):
    return get_service(db).list_products()


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return get_service(db).get_product(product_id)


@router.post("", response_model=ProductRead, status_code=201, dependencies=[Depends(require_auth)])
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    return get_service(db).create_product(payload)


@router.put("/{product_id}", response_model=ProductRead, dependencies=[Depends(require_auth)])
def update_product(product_id: int, payload: ProductUpdate, db: Session = Depends(get_db)):
    return get_service(db).update_product(product_id, payload)


@router.delete("/{product_id}", response_model=Message, dependencies=[Depends(require_auth)])
def delete_product(product_id: int, db: Session = Depends(get_db)):
    get_service(db).delete_product(product_id)
    return Message(message="Product deleted")
