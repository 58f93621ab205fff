from .crud import CrudService


class CustomerService(CrudService):
    repository_name = "customers"
    entity_name = "Customer"
    non_nullable = ("name",)


class ClientService(CrudService):
    repository_name = "clients"
    entity_name = "Client"
    non_nullable = ("name",)
