"""Personnel and equipment cost allocation."""
