# Prompts and status lines shown by the console (rich markup).

TITLE = "Image Generation"
SUBTITLE = "Azure OpenAI · OpenAI · Google AI"

SELECT_PROVIDER = "[yellow]Select your provider:[/]"
ENTER_AZURE_ENDPOINT = "[yellow]Enter your Azure OpenAI endpoint:[/]"
ENTER_AZURE_API_KEY = "[yellow]Enter your Azure OpenAI API key:[/]"
ENTER_OPENAI_API_KEY = "[yellow]Enter your OpenAI API key:[/]"
ENTER_GOOGLE_API_KEY = "[yellow]Enter your Google AI API key:[/]"
ENTER_IMAGE_PROMPT = "[yellow]Enter your image prompt:[/]"
SELECT_MODELS = "[yellow]Select the models you want to use:[/]"
ENTER_DEPLOYMENTS = (
    "[yellow]Enter your Azure OpenAI deployment names "
    "(format: 'deploymentName:modelType', comma-separated):[/]\n"
    "[dim]Example: myDallE:dall-e-3,myGptImage:gpt-image-1[/]\n"
    "[dim]Supported model types: {0}[/]"
)

STARTING_GENERATION = "[green]Starting image generation...[/]"
IMAGES_GENERATED = "✓ {0} image(s) generated successfully!"
IMAGES_FAILED = "✗ {0} image(s) failed to generate."
PRESS_KEY_TO_EXIT = "Press Enter to exit..."

ERROR_INITIALIZING_CLIENT = "Error initializing {0} client: {1}"
