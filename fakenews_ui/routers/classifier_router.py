from fastapi import APIRouter, Depends

from ..controllers.classifier_controller import ClassificationController, get_controller
from ..schemas import AnalysisInput, AnalysisOutcome, ControllerState

router = APIRouter()

@router.get("/analysis", response_model=ControllerState)
def get_analysis(controller: ClassificationController = Depends(get_controller)):
    return controller.snapshot()

@router.post("/analysis", response_model=AnalysisOutcome)
def submit_analysis(input_data: AnalysisInput, controller: ClassificationController = Depends(get_controller)):
    """
    Submit a title/body pair for classification. Failures come back as a
    normal outcome with status "failure" so the page can show them.
    """
    return controller.submit(input_data)

@router.delete("/analysis", response_model=ControllerState)
def clear_analysis(controller: ClassificationController = Depends(get_controller)):
    controller.clear()
    return controller.snapshot()
