from app.models import Photo
from app.repositories.base import Repository
from app.repositories.deletion import DeletionPolicy
from app.schemas.photo import PhotoCreate, PhotoUpdate


class PhotoRepository(Repository[Photo, PhotoCreate, PhotoUpdate]):
    model = Photo
    deletion_policy = DeletionPolicy.timestamp("deleted_at")
