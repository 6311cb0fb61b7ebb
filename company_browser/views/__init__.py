from .technology_view import TechnologyCategoryView
from .geography_view import GeographyView
from .funding_bubble_view import FundingBubbleView
from .funding_trends_view import FundingTrendsView
from .funding_stage_view import FundingStageView
from .quarterly_funding_view import QuarterlyFundingView
from .github_repos_view import GithubReposView
from .patent_category_view import PatentCategoryView

__all__ = [
    "TechnologyCategoryView",
    "GeographyView",
    "FundingBubbleView",
    "FundingTrendsView",
    "FundingStageView",
    "QuarterlyFundingView",
    "GithubReposView",
    "PatentCategoryView",
]
