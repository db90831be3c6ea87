from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class Member(BaseModel):
    id: str
    name: str
    email: str = ""
    avatar: str = ""

    class Config:
        frozen = True

class MemberRef(BaseModel):
    user_id: str
    name: str
    avatar: str = ""

    class Config:
        frozen = True
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def of(cls, member: Member) -> "MemberRef":
        return cls(user_id=member.id, name=member.name, avatar=member.avatar)
