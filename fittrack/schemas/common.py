from pydantic import BaseModel


class Page(BaseModel):
    page: int
    page_size: int
    start: int
    end: int
