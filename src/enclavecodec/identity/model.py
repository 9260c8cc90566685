from pydantic import BaseModel, ConfigDict, Field
from typing import Any


class IdentityDocument(BaseModel):
    """Enclave identity JSON plus the hex signature over it."""

    model_config = ConfigDict(populate_by_name=True)

    enclave_identity: Any = Field(alias="enclaveIdentity")
    signature: str


class EnclaveIdentityJsonObj(BaseModel):
    # mirrors the on-chain struct (string identityStr, bytes signature)
    model_config = ConfigDict(populate_by_name=True)

    identity_str: str = Field(alias="identityStr")
    signature: str
