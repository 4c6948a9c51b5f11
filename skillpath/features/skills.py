SUGGESTED_SKILLS: tuple[str, ...] = (
    "HTML",
    "CSS",
    "JavaScript",
    "React",
    "Python",
    "Java",
    "Node.js",
    "Communication",
    "Excel",
    "Graphic Design",
    "Video Editing",
    "Data Analysis",
    "SQL",
    "Machine Learning",
    "Digital Marketing",
    "Content Writing",
    "Photography",
    "UI/UX Design",
    "Project Management",
    "Sales",
)