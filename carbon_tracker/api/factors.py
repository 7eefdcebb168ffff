from fastapi import APIRouter, Depends

from carbon_tracker.services.emissions import EmissionCalculator, get_calculator

router = APIRouter()


@router.get("")
def list_factors(calculator: EmissionCalculator = Depends(get_calculator)):
    """Known category/type pairs with the unit each quantity is expected in."""
    return calculator.catalog()
