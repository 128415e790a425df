# User-facing Persian strings shared by the web UI and the CLI.

EMPTY_KEYWORDS = "لطفا حداقل یک کلیدواژه وارد کنید."
CREDENTIAL_FAILURE = "خطا در ارتباط با هوش مصنوعی. لطفاً کلید API خود را بررسی و مجدداً انتخاب کنید."
GENERIC_FAILURE = "خطا در دریافت موضوعات. لطفاً دوباره تلاش کنید."
SELECTOR_FAILED = "خطا در باز کردن پنجره انتخاب کلید API."
SELECTOR_UNAVAILABLE = "امکان انتخاب کلید API در این محیط وجود ندارد. لطفاً از طریق تنظیمات کلید را فراهم کنید."

APP_TITLE = "پیشنهاد موضوع پایان‌نامه با هوش مصنوعی"
APP_SUBTITLE = "کلیدواژه‌های خود را وارد کنید تا هوش مصنوعی چندین موضوع جذاب و مرتبط برای پایان‌نامه شما پیشنهاد دهد."
KEYWORDS_LABEL = "کلیدواژه‌های اصلی پایان‌نامه شما:"
KEYWORDS_PLACEHOLDER = "مثال: یادگیری عمیق، پردازش زبان طبیعی، زبان فارسی، تحلیل احساسات"
KEYWORDS_HELP = "چندین کلیدواژه مرتبط با حوزه تحقیقاتی خود را با کاما از هم جدا کنید."
SUBMIT_LABEL = "تولید موضوعات پایان‌نامه"
LOADING_TITLE = "درحال تولید موضوعات پایان‌نامه..."
LOADING_HINT = "این فرآیند ممکن است چند لحظه طول بکشد."
RESULTS_HEADING = "موضوعات پیشنهادی:"
NO_TOPICS_TITLE = "هیچ موضوعی یافت نشد!"
NO_TOPICS_HINT = "لطفاً با کلیدواژه‌های متفاوت دوباره تلاش کنید."
ERROR_PREFIX = "خطا: "
CARD_KEYWORDS = "کلمات کلیدی:"
CARD_QUESTIONS = "پرسش‌های تحقیقاتی احتمالی:"

CREDENTIAL_PROMPT_TITLE = "کلید API نیاز است!"
CREDENTIAL_PROMPT_BODY = "برای استفاده از این برنامه، یک کلید API گوگل جیمینی نیاز است. لطفاً روی دکمه زیر کلیک کنید."
CREDENTIAL_BILLING_LINK = "مستندات صورت‌حساب"
CREDENTIAL_BILLING_URL = "https://ai.google.dev/gemini-api/docs/billing"
CREDENTIAL_BILLING_PREFIX = "برای اطلاعات بیشتر در مورد صورت‌حساب، به "
CREDENTIAL_BILLING_SUFFIX = " مراجعه کنید."
CREDENTIAL_BUTTON = "انتخاب کلید API"
CREDENTIAL_DIALOG_TITLE = "کلید API"
CREDENTIAL_DIALOG_PROMPT = "کلید API گوگل جیمینی را وارد کنید:"

FOOTER = "ساخته شده با ❤️ و هوش مصنوعی. قدرت گرفته از Google Gemini API."
