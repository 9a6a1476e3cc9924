# item.py - Schemas Pydantic para Item

from pydantic import BaseModel, ConfigDict


class ItemBase(BaseModel):
    # Sin validaciones: se acepta cualquier valor, incluso negativos
    model_config = ConfigDict(frozen=True, from_attributes=True)

    name: str
    price: float
    quantity: float  # float a propósito, igual que en el almacén


class ItemCreate(ItemBase):
    pass


class Item(ItemBase):
    id: str  # asignado por la capa de persistencia

    def __str__(self) -> str:
        return (
            f"Item(id={self.id}, name={self.name}, "
            f"price={self.price}, quantity={self.quantity})"
        )
