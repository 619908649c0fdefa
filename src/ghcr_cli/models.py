from pydantic import BaseModel


class Owner(BaseModel):
    login: str


class Repository(BaseModel):
    full_name: str


class Package(BaseModel):
    name: str
    owner: Owner | None = None
    repository: Repository | None = None


class Version(BaseModel):
    name: str
    id: int


class OutputVersion(BaseModel):
    package: str
    name: str
    id: int
