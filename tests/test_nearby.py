from nearby import NEARBY_DISTRICTS, NearbyDistrictResolver


def test_known_district():
    assert NearbyDistrictResolver().resolve("Pune") == "Mumbai"


def test_unknown_district():
    assert NearbyDistrictResolver().resolve("Nagpur") is None


def test_relation_is_directed():
    resolver = NearbyDistrictResolver()
    assert resolver.resolve("Delhi") == "Gurgaon"
    assert resolver.resolve("Gurgaon") is None


def test_single_hop_only():
    # Pune -> Mumbai -> Thane, but only one hop is taken
    assert NearbyDistrictResolver().resolve("Pune") == "Mumbai"


def test_lookup_is_case_sensitive():
    assert NearbyDistrictResolver().resolve("pune") is None


def test_custom_table():
    resolver = NearbyDistrictResolver({"Nagpur": "Wardha"})
    assert resolver("Nagpur") == "Wardha"
    assert resolver("Pune") is None


def test_default_resolver_uses_full_table():
    resolver = NearbyDistrictResolver()
    for district, nearby in NEARBY_DISTRICTS.items():
        assert resolver(district) == nearby
