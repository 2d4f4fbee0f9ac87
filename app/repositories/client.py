from app.models import Client
from app.repositories.base import Repository
from app.repositories.deletion import DeletionPolicy
from app.schemas.client import ClientCreate, ClientUpdate


class ClientRepository(Repository[Client, ClientCreate, ClientUpdate]):
    model = Client
    deletion_policy = DeletionPolicy.deactivate("is_active")
