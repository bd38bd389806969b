"""
This package defines the domain vocabulary shared by the decoders: cluster
identifiers and ZCL status codes.
"""
from zigbeelink.domain.clusters import ClusterId, Status, cluster_id, status_name

__all__ = ["ClusterId", "Status", "cluster_id", "status_name"]
