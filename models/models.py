from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

NOT_AVAILABLE = "N/A"


class ForwardedHeader(BaseModel):
    """
    Original sender/subject/date found in a forwarded-message block.
    None means the label was not found; "" means it was found but empty.
    """
    model_config = ConfigDict(populate_by_name=True)

    from_: Optional[str] = Field(default=None, alias="from")
    subject: Optional[str] = None
    date: Optional[str] = None


class TransactionFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    akhir_kartu: str = Field(default=NOT_AVAILABLE, alias="akhirKartu")
    merchant: str = NOT_AVAILABLE
    tanggal_transaksi: str = Field(default=NOT_AVAILABLE, alias="tanggalTransaksi")
    nominal: str = NOT_AVAILABLE


class EmailSender(BaseModel):
    name: str = ""
    address: str = ""

    def display(self) -> str:
        return f"{self.name} <{self.address}>"


class DecodedEmail(BaseModel):
    subject: Optional[str] = None
    sender: Optional[EmailSender] = None
    text: Optional[str] = None
    html: Optional[str] = None
