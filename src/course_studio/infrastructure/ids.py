from bson import ObjectId

from course_studio.application.id_generator import IdGenerator


class ObjectIdGenerator(IdGenerator):
    def new_id(self) -> str:
        return str(ObjectId())

    def is_valid(self, value: str) -> bool:
        return ObjectId.is_valid(value)
