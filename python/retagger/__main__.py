"""Allow running as: python -m retagger"""

from retagger.main import main

main()
