"""
This package contains all modules related to decoding payloads received from
the coordinator.

Sub-packages handle specific layers:

- ``datatypes``: Width table and value codec for ZCL data type tags.
- ``attributes``: Attribute records and the collection they are decoded into.
- ``frames``: Frame header, attribute response variants and command dispatch.
- ``zdo``: Announcements, node/simple descriptors and bind results.
- ``messages``: Routing of coordinator message types to decoders.
"""
