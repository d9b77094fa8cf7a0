# Text written to the result label. Either a provider description or one of
# the fixed messages below.
DisplayResult = str

EMPTY_INPUT_MESSAGE: DisplayResult = "Please enter a city"
CITY_NOT_FOUND_MESSAGE: DisplayResult = "Couldn't find weather for that city - please try another."
FETCH_FAILED_MESSAGE: DisplayResult = "Couldn't fetch weather right now - please try again."
MISSING_BINDINGS_NOTICE: DisplayResult = (
    "Your developer didn't hook up the interface builder outlets. "
    "This will only appear in a production build"
)
