import pytest

import tfpath

AWS_KEY = "registry.terraform.io/hashicorp/aws"

RAW_SCHEMA = {
    "format_version": "1.0",
    "provider_schemas": {
        AWS_KEY: {
            "provider": {
                "version": 0,
                "block": {
                    "attributes": {
                        "region": {"type": "string", "optional": True},
                    },
                    "block_types": {
                        "assume_role": {
                            "nesting_mode": "list",
                            "max_items": 1,
                            "block": {
                                "attributes": {
                                    "role_arn": {"type": "string", "optional": True}
                                }
                            },
                        }
                    },
                },
            },
            "resource_schemas": {
                "aws_instance": {
                    "version": 1,
                    "block": {
                        "attributes": {
                            "ami": {"type": "string", "required": True},
                            "tags": {"type": ["map", "string"], "optional": True},
                            "security_groups": {
                                "type": ["set", "string"],
                                "optional": True,
                                "computed": True,
                            },
                            "root_block_device": {"type": "string", "optional": True},
                            "network_interfaces": {
                                "type": [
                                    "list",
                                    [
                                        "object",
                                        {
                                            "name": "string",
                                            "device_index": "number",
                                            "addresses": ["list", "string"],
                                        },
                                    ],
                                ],
                                "computed": True,
                            },
                            "settings": {
                                "type": ["object", {"enabled": "bool"}],
                                "optional": True,
                            },
                        },
                        "block_types": {
                            "root_block_device": {
                                "nesting_mode": "list",
                                "max_items": 1,
                                "block": {
                                    "attributes": {
                                        "volume_size": {
                                            "type": "number",
                                            "optional": True,
                                        }
                                    },
                                    "block_types": {
                                        "encryption": {
                                            "nesting_mode": "single",
                                            "block": {
                                                "attributes": {
                                                    "kms_key_id": {
                                                        "type": "string",
                                                        "optional": True,
                                                    }
                                                }
                                            },
                                        }
                                    },
                                },
                            },
                            "ebs_block_device": {
                                "nesting_mode": "set",
                                "block": {
                                    "attributes": {
                                        "device_name": {
                                            "type": "string",
                                            "required": True,
                                        }
                                    }
                                },
                            },
                        },
                    },
                },
                "aws_security_group": {
                    "version": 1,
                    "block": {
                        "attributes": {
                            "ingress": {
                                "type": [
                                    "set",
                                    [
                                        "object",
                                        {
                                            "cidr_blocks": ["list", "string"],
                                            "from_port": "number",
                                        },
                                    ],
                                ],
                                "optional": True,
                            }
                        }
                    },
                },
            },
            "data_source_schemas": {
                "aws_ami": {
                    "version": 0,
                    "block": {
                        "attributes": {
                            "id": {"type": "string", "computed": True},
                            "block_device_mappings": {
                                "type": [
                                    "set",
                                    ["object", {"device_name": "string"}],
                                ],
                                "computed": True,
                            },
                        }
                    },
                }
            },
        },
        "registry.terraform.io/hashicorp/random": {
            "resource_schemas": {
                "random_id": {
                    "version": 0,
                    "block": {"attributes": {"hex": {"type": "string"}}},
                }
            }
        },
    },
}


@pytest.fixture
def raw_schema() -> dict:
    return RAW_SCHEMA


@pytest.fixture
def schema() -> tfpath.ProviderSchema:
    return tfpath.load_provider_schema(RAW_SCHEMA)


@pytest.fixture
def scope(schema: tfpath.ProviderSchema) -> tfpath.Scope:
    return tfpath.Scope(provider_schema=schema)
