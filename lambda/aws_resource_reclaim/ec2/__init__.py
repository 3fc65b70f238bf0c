"""EC2 and VPC resource deleters."""

from .instances import delete_instance
from .network import (
    cleanup_network_interfaces,
    delete_internet_gateway,
    delete_route_table,
    delete_security_group,
    delete_subnet,
    delete_vpc,
)
from .gateways import delete_nat_gateway, release_elastic_ip
from .key_pairs import delete_key_pair

__all__ = [
    "delete_instance",
    "cleanup_network_interfaces",
    "delete_internet_gateway",
    "delete_route_table",
    "delete_security_group",
    "delete_subnet",
    "delete_vpc",
    "delete_nat_gateway",
    "release_elastic_ip",
    "delete_key_pair",
]
