MAX_RATING = 5

def calculate_rating(is_addon: bool, is_3d: bool, has_tower: bool,
                     num_taxi_path: int, num_parking: int, num_apron: int) -> int:
    """
    Rating of the facility richness of an airport from 0 to 5.

    One point each for taxiways, parking, aprons and add-on scenery. An
    airport with at least one point and 3D scenery or a tower object gets
    one extra point.
    """
    rating = (int(num_taxi_path > 0) + int(num_parking > 0) + int(num_apron > 0) + int(is_addon))

    if rating > 0 and (is_3d or has_tower):
        rating += 1

    return min(rating, MAX_RATING)
