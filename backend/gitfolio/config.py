from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    github_username: str = Field(default="IloveChanel", alias="GITHUB_USERNAME")
    github_token: Optional[str] = Field(default=None, alias="GITHUB_TOKEN")
    github_base_url: HttpUrl = Field(
        default="https://api.github.com", alias="GITHUB_BASE_URL"
    )
    github_proxy: Optional[str] = Field(default=None, alias="GITHUB_PROXY")
    github_api_version: str = Field(default="2022-11-28", alias="GITHUB_API_VERSION")
    cache_ttl_seconds: int = Field(default=600, alias="CACHE_TTL_SECONDS")
    storage_path: Path = Field(default=Path(".gitfolio/storage.json"), alias="STORAGE_PATH")

    # exact repo names, matched case-insensitively
    featured_repos: List[str] = Field(
        default=[
            "michelle-portfolio-website",
            "Travelrecommendation",
            "mvp-painting-site-website",
            "oakland-macomb-landing",
        ],
        alias="FEATURED_REPOS",
    )
    excluded_repos: List[str] = Field(
        default=[
            "visual-voicemail-app",
            "porfolio",
            "portfolio-website",
            "michelle-portfolio-testing",
            "michelle-portfolio-main",
            "michelle-vance-portfolio",
            "astro-platform-starter",
        ],
        alias="EXCLUDED_REPOS",
    )
    # keyed by exact repo name
    # descriptions are only used when the GitHub description is empty
    custom_descriptions: Dict[str, str] = Field(
        default={
            "michelle-portfolio-website": (
                "Professional portfolio for Michelle Vance - Creative Developer, AI Engineer & "
                "Marketing Strategist. Features AI chatbot, animated backgrounds, flip cards, SEO "
                "optimization, and Vercel deployment. Live at michelletrendsetter.com."
            ),
            "Travelrecommendation": (
                "3-page travel website featuring company information, team profiles, and searchable "
                "exotic destinations (beaches, temples, cities). Built with dynamic search "
                "functionality and JSON API integration."
            ),
            "mvp-painting-site-website": (
                "Professional painting contractor website for MVP Painting. Features service pages, "
                "contact forms, gallery, responsive design, and SEO optimization for Oakland and "
                "Macomb counties."
            ),
            "oakland-macomb-landing": (
                "Professional landing page for MVP Painting serving Oakland & Macomb counties. "
                "Features responsive design, embedded CSS, hero section, and service showcase for "
                "residential and commercial painting."
            ),
            "gitportfolio": (
                "Personal portfolio website showcasing projects and skills. Features dynamic GitHub "
                "integration, responsive design, project cards, and professional layout."
            ),
            "giftlink-project": (
                "Full-stack containerized gift management application with React frontend and "
                "Node.js backend. Deployed on Kubernetes and IBM Code Engine with MongoDB, JWT "
                "authentication, and automated CI/CD."
            ),
            "tax-calculator-cicd-pipeline": (
                "Tax calculator web app with a complete Tekton CI/CD pipeline. Deployed on IBM Cloud "
                "Code Engine with Docker, Nginx and automated Jasmine tests."
            ),
            "LogisticsShippingRates": (
                "Shipping rate calculation tool with Git CLI practice. Includes shell scripts for "
                "logistics calculations and contribution guidelines."
            ),
            "dealer_evaluation_backend": (
                "Backend API for a dealer evaluation system. Node.js/Express backend managing dealer "
                "ratings, reviews, and analytics."
            ),
        },
        alias="CUSTOM_DESCRIPTIONS",
    )
    custom_homepages: Dict[str, str] = Field(
        default={
            "michelle-portfolio-website": "https://www.michelletrendsetter.com",
            "Travelrecommendation": "https://ilovechanel.github.io/Travelrecommendation/",
            "mvp-painting-site-website": "https://ilovechanel.github.io/mvp-painting-site-website/",
            "oakland-macomb-landing": "https://ilovechanel.github.io/oakland-macomb-landing/",
            "gitportfolio": "https://ilovechanel.github.io/gitportfolio/",
            "giftlink-project": "https://ilovechanel.github.io/giftlink-project/",
            "expressBookReviews": "https://ilovechanel.github.io/expressBookReviews/",
            "e-plantShopping": "https://ilovechanel.github.io/e-plantShopping/",
        },
        alias="CUSTOM_HOMEPAGES",
    )
    project_images: Dict[str, str] = Field(
        default={
            "michelle-portfolio-website": "images/michelle_trendsetter.png",
            "Travelrecommendation": "images/Tavel_recommendation.png",
            "mvp-painting-site-website": "images/mvp-painting.jpg",
            "oakland-macomb-landing": "images/oakland_macomb_landing.png",
        },
        alias="PROJECT_IMAGES",
    )

    owner_name: str = Field(default="Michelle Vance", alias="OWNER_NAME")
    portfolio_url: str = Field(
        default="https://ilovechanel.github.io/gitportfolio/", alias="PORTFOLIO_URL"
    )
    portfolio_title: str = Field(
        default="Michelle Vance | Developer Portfolio", alias="PORTFOLIO_TITLE"
    )
    portfolio_text: str = Field(
        default="Check out Michelle Vance's developer portfolio",
        alias="PORTFOLIO_TEXT",
    )

    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"  # ignore unrelated env vars to avoid validation errors

    @property
    def profile_url(self) -> str:
        return f"https://github.com/{self.github_username}?tab=repositories"


@lru_cache
def get_settings() -> Settings:
    return Settings()
