from restful_crud.models.objects import ApiObject, DeleteConfirmation, ObjectPayload

__all__ = ["ApiObject", "DeleteConfirmation", "ObjectPayload"]
